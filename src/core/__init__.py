"""
Core domain models, pricing math, and configuration contracts.

This module contains the foundational building blocks that are independent
of the rendering layer (page shells, routing, persistence).
"""
