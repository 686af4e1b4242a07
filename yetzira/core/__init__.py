"""Core derivations: status classification, aggregation, grid mapping,
plus the record store and the snapshot loader that feed them."""
