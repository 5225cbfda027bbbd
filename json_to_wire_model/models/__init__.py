"""Wire models generated from the shipped example schemas. Regenerate with ``json_to_wire_model generate-all``."""
