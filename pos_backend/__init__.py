"""Point-of-sale backend: product catalog and sales invoices."""
