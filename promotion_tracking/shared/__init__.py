"""
Cross-cutting concerns shared by every layer:
- Error handling and mapping
- Security middleware
- Rate limiting
- Logging configuration
"""
