"""HTTP API for the DocuForge document engine."""
