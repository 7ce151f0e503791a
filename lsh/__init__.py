"""LSH - a minimal interactive command interpreter."""
