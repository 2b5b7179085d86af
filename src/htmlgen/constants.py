"""
Shared constants for chart and HTML generation.
"""

ECHARTS_URL = "https://cdn.bootcss.com/echarts/4.7.0/echarts.min.js"

CONFIRM_TITLE = "主要疫情国家确诊趋势图"
DEATH_TITLE = "主要疫情国家死亡趋势图"
NEW_CONFIRMED_TITLE = "主要疫情国家新增确诊趋势图"
