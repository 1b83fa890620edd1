# Distinct chemical types a single well may be plumbed for, any status
MAX_DISTINCT_CHEMICALS_PER_WELL: int = 3

# Matched by exact product name, not by catalog id. Renaming either product
# in the catalog silently disables the interlock.
INCOMPATIBLE_CHEMICAL_PAIRS: tuple[tuple[str, str], ...] = (
    ("Product A", "Product C"),
)
