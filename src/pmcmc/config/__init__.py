"""Run control schema, builder and YAML loading."""
