"""I/O layer: Arrow schemas, output paths and scenario documents."""
