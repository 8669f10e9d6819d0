"""Common Application Components.

공통 Port:
- StateStoragePort: 로컬 영속 저장소
- AssetRepositoryPort: 정적 에셋 (지역 목록, 미니게임 항목)
"""
