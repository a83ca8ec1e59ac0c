import jinja2

DESCRIPTOR_TEMPLATE = jinja2.Template(
    """<?xml version="1.0" encoding="UTF-8"?>
{{ service }}
"""
)
