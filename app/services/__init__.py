"""서비스 패키지 — 엔티티별 비즈니스 로직 계층.

Service package — maps repository results onto response schemas and
raises EntityNotFoundError for ids that do not resolve.
"""
