"""Gym Attendance package.

This package is organized by feature modules (members, attendance) on top of a
small key-value storage layer, with a thin Flask controller layer and
service/repository layers underneath.
"""
