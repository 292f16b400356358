"""SalesBridge: CTM call attribution forwarded to GA4 as purchase events."""
