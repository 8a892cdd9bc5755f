"""Student and instructor records kept in per-type JSON files."""
