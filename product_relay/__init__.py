"""
Product Relay

Modules:
    models     - Data models (Product, ProductBatch)
    common     - Shared utilities (errors, config loader, logging)
    transport  - Pooled HTTP GET/POST executor
    client     - Fetch / send / fetch-then-send workflow and JSON translation
"""
