"""
核心業務邏輯層

這個 package 包含所有核心業務邏輯，包括：
- DigitState：算盤棒的數字狀態與進位規則
- RoundController：回合生命週期與勝利判定
- GameManager：管理多個獨立遊戲的生命週期
- Locks：並發控制工具
"""
