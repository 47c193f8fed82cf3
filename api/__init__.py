"""
API 層

FastAPI routers：
- games：建立 / 查詢 / 結束遊戲
- rounds：開新回合、調整算盤棒
"""
