"""
Purchase Approval - Purchase Financing Decision Service

A FastAPI-based microservice that decides whether a purchase financing
offer can be approved for a customer and, if the exact request cannot be
honored, computes the best alternative offer.
"""

__version__ = "0.1.0"
