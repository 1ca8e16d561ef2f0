"""Tollgate - JWT authentication service.

Registers users, authenticates logins, issues and rotates access/refresh
token pairs, and gates HTTP routes by role.
"""
