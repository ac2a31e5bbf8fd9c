"""서비스 패키지: 비즈니스 로직 계층.

Service package: Business logic layer.
Services call repositories, turn query build errors into 400 responses and
empty results into 404 responses.
"""
