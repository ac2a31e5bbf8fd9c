"""레포지토리 패키지: 데이터베이스 쿼리 계층.

Repository package: Database query layer.
Each repository extends BaseRepository, which splices the fragments built by
app.query into fixed positional SQL templates.
"""
