"""Service layer — operations returning ServiceResult."""
