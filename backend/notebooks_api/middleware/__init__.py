# Middleware package init
"""
Notebooks API — Middleware
===========================

Chain (outermost first):
    Request → [Request ID] → [Access Log] → [CORS] → Controller

Request ID runs first so the access log line carries the id.
"""
