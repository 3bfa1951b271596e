# translations.py
"""UI labels in English and Traditional Chinese."""

from typing import Dict

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "title": "GUDID Chronicles",
        "subtitle": "Medical device supply-chain explorer",
        "analytics": "Analytics",
        "agents": "Agent Chat",
        "agent_hq": "Agent HQ",
        "guide": "Guide",
        "upload": "Upload packing list",
        "load_sample": "Load sample data",
        "filters": "Filters",
        "supplier": "Supplier",
        "device": "Device",
        "start_date": "Start date",
        "end_date": "End date",
        "all": "All",
        "total_lines": "Total lines",
        "total_units": "Total units",
        "unique_suppliers": "Unique suppliers",
        "unique_customers": "Unique customers",
        "time_series": "Units delivered over time",
        "top_devices": "Top devices by units",
        "graph": "Supplier / device / customer network",
        "preview": "Data preview",
        "chat_placeholder": "Ask the agent about the filtered data...",
        "send": "Send",
        "theme": "Painter style",
        "jackpot": "Spin style jackpot",
        "dark_mode": "Dark mode",
        "language": "Language",
        "usage_log": "Usage log",
        "no_data": "No records match the current filters.",
    },
    "zh": {
        "title": "GUDID 編年史",
        "subtitle": "醫療器材供應鏈探索",
        "analytics": "分析",
        "agents": "代理人對話",
        "agent_hq": "代理人總部",
        "guide": "使用說明",
        "upload": "上傳裝箱單",
        "load_sample": "載入範例資料",
        "filters": "篩選",
        "supplier": "供應商",
        "device": "器材",
        "start_date": "開始日期",
        "end_date": "結束日期",
        "all": "全部",
        "total_lines": "總筆數",
        "total_units": "總數量",
        "unique_suppliers": "供應商數",
        "unique_customers": "客戶數",
        "time_series": "每日交貨數量",
        "top_devices": "數量最多的器材",
        "graph": "供應商 / 器材 / 客戶 關係網絡",
        "preview": "資料預覽",
        "chat_placeholder": "詢問代理人關於篩選後的資料...",
        "send": "送出",
        "theme": "畫家風格",
        "jackpot": "風格拉霸",
        "dark_mode": "深色模式",
        "language": "語言",
        "usage_log": "使用紀錄",
        "no_data": "沒有符合目前篩選條件的資料。",
    },
}

LANGUAGES = {"en": "English", "zh": "中文"}


def get_text(lang: str) -> Dict[str, str]:
    """Labels for a language; unknown codes fall back to English."""
    return TRANSLATIONS.get(lang, TRANSLATIONS["en"])
