"""Shared CLI scaffolding: framework, errors, output, pipelines, YAML IO."""
