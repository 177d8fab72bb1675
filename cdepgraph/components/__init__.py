"""
Components package: single-purpose building blocks (lexing, reading, rendering).
"""
