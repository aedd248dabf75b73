"""gdiffs - side-by-side review of the changes between two git revisions."""
