"""EcoSort - Clean Architecture.

폐기물 분류 서비스:
1. Classify: 이미지/텍스트 분류 (Gemini 3 Flash / GPT-5)
2. History: 스캔 이력 (최대 50건, 최신순)
3. Preferences: 지역(국가) 설정
4. Game: 분리배출 미니게임 포인트
"""
