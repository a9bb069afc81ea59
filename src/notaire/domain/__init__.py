"""Domain layer: entities, value objects, exceptions, repositories."""
