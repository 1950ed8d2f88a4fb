"""Services Layer — data access queries and the invoice mutation pipeline.

Invariants:
    - Services receive their SessionProvider / ViewCache through __init__
      (no module-level store handle)
    - Every store call goes through SessionProvider.session(operation)

Design Decisions:
    - One query class per page family (dashboard, invoices, customers) for locality
"""
