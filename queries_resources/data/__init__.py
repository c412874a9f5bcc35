"""Resource files bundled with queries_resources, one directory per language."""
