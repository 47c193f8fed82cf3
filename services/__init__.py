"""
服務層

這個 package 包含純計算邏輯，不負責狀態轉換：
- TargetService：目標數字產生邏輯
- StatusService：狀態文字與顯示格式
"""
