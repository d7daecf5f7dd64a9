"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Each repository extends BaseRepository for id-keyed CRUD and adds the
few resource-specific queries its service needs. Repositories only flush;
commits belong to the service transaction.
"""
