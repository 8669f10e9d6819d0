"""EcoSort Setup - 설정, 로깅, DI."""
