"""Document schema and response framing"""
