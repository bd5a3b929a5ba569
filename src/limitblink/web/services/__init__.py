"""Request processing services for the action endpoints.

These services:
- Resolve and validate query parameters and POST bodies
- Assemble limit-order requests
- Prepare unsigned transactions for client signing
"""
