"""Package Express reference data: limits, pricing, and message text."""
