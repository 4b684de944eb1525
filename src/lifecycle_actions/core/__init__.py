"""Core domain of lifecycle actions: value objects, entities, protocols and exceptions."""
