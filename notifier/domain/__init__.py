"""Domain layer: notification entities, errors and collaborator contracts."""
