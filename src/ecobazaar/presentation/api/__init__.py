"""FastAPI presentation layer for the EcoBazaar auth service."""
