"""Foundation: config, errors, handler base classes, registry, testing."""
