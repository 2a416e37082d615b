"""Chronolog attendance package.

Organized by feature module (attendance, ...) with a thin Flask controller
layer on top of service/repository layers.
"""
