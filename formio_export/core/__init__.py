"""Core export logic: models, ports, builders and the FormioExport orchestrator."""
