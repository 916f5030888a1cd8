"""Attendance Tracker package.

A single JSON document (employees, attendance, status types, cylinders,
rules) kept in a local blob store. Organized by feature modules with plain
service classes over one DocumentStore and a thin Flask controller layer.
"""
