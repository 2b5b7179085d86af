"""Country list for the trend chart."""

from tracker.models import Country

# Upstream Country_Region code -> display label
COUNTRY_LIST = [
    Country("US", "美国"),
    Country("Spain", "西班牙"),
    Country("Italy", "意大利"),
    Country("Germany", "德国"),
    Country("France", "法国"),
    Country("China", "中国"),
    Country("Iran", "伊朗"),
    Country("United Kingdom", "英国"),
    Country("Turkey", "土耳其"),
    Country("Switzerland", "瑞士"),
    Country("Belgium", "比利时"),
    Country("Netherlands", "荷兰"),
    Country("Canada", "加拿大"),
    Country("Austria", "奥地利"),
    Country("Portugal", "葡萄牙"),
]
