"""
Pydantic request/response models for all API endpoints.

Wire format follows the browser frontend (camelCase via field aliases).
"""
