"""
Employee records: HTTP routes, request schema and SQL for the EMPLOYEES table.
"""
