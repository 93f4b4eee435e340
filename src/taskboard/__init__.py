"""Taskboard package.

Employee/task management backend organized by feature modules (employees,
tasks) with a thin Flask controller layer on top of service/repository layers.
"""
