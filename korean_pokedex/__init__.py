"""Random first-generation Pokemon with its Korean name, via PokeAPI."""
