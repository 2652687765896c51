"""User-facing front-ends for filecounter."""
