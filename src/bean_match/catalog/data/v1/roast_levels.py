ROAST_LEVELS = [
    {
        "id": "light",
        "name": "라이트",
        "english_name": "Light",
        "aliases": ["light", "라이트", "Light", "light roast", "약배전", "cinnamon", "시나몬"],
    },
    {
        "id": "medium_light",
        "name": "미디엄 라이트",
        "english_name": "Medium Light",
        "aliases": [
            "medium_light",
            "미디엄 라이트",
            "Medium Light",
            "medium-light",
            "중약배전",
            "high",
            "하이",
        ],
    },
    {
        "id": "medium",
        "name": "미디엄",
        "english_name": "Medium",
        "aliases": ["medium", "미디엄", "Medium", "medium roast", "중배전", "city", "시티"],
    },
    {
        "id": "medium_dark",
        "name": "미디엄 다크",
        "english_name": "Medium Dark",
        "aliases": [
            "medium_dark",
            "미디엄 다크",
            "Medium Dark",
            "medium-dark",
            "중강배전",
            "full city",
            "풀시티",
        ],
    },
    {
        "id": "dark",
        "name": "다크",
        "english_name": "Dark",
        "aliases": ["dark", "다크", "Dark", "dark roast", "강배전", "french", "프렌치", "italian", "이탈리안"],
    },
]
