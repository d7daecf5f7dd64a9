"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
``BaseService`` implements the CRUD operations once; each resource service
binds it to a repository and its view classes and adds resource rules
(duplicate names, child checks, time windows). Writes run inside one
transaction per call.
"""
