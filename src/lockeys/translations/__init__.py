"""Packaged locale catalogues (``<locale>.strings`` or ``<locale>.json``)."""
