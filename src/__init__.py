"""
Loan Gateway - Short-Term Loan Issuance & Extension Service

A FastAPI-based microservice that issues short-term loans with a fixed
principal and extends them by a fixed term, keeping every change as an
append-only loan record.
"""

__version__ = "0.1.0"
