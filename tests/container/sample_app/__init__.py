"""Sample application scanned by the package-scanning tests."""
