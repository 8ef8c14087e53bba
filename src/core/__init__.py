"""Domain core: entities, accounting, ports and services."""
