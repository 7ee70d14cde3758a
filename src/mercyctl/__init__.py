"""mercyctl: codec, digest, hex and domain-permutation toolkit CLI."""

__version__ = "0.3.0"
