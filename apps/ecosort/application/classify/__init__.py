"""Classify Feature - 폐기물 분류 유스케이스.

Clean Architecture 구조:
- commands/: Command Handlers (스캔 오케스트레이션)
- dto/: Data Transfer Objects
- ports/: Application Ports (ABC)
- prompts.py: 프롬프트 빌더 (순수 함수)
- client.py: 분류 클라이언트 (요청 + 검증 디코딩)
"""
