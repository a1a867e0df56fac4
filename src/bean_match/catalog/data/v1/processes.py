PROCESSING_METHODS = [
    {
        "id": "washed",
        "name": "워시드",
        "english_name": "Washed",
        "aliases": ["washed", "워시드", "Washed", "fully washed", "수세식", "wet process", "워시트"],
    },
    {
        "id": "natural",
        "name": "내추럴",
        "english_name": "Natural",
        "aliases": ["natural", "내추럴", "Natural", "네추럴", "내츄럴", "dry process", "건식", "sun dried"],
    },
    {
        "id": "honey",
        "name": "허니",
        "english_name": "Honey",
        "aliases": ["honey", "허니", "Honey", "honey process", "pulped natural", "펄프드 내추럴"],
    },
    {
        "id": "black_honey",
        "name": "블랙 허니",
        "english_name": "Black Honey",
        "aliases": ["black_honey", "블랙 허니", "Black Honey", "블랙허니"],
    },
    {
        "id": "red_honey",
        "name": "레드 허니",
        "english_name": "Red Honey",
        "aliases": ["red_honey", "레드 허니", "Red Honey", "레드허니"],
    },
    {
        "id": "yellow_honey",
        "name": "옐로우 허니",
        "english_name": "Yellow Honey",
        "aliases": ["yellow_honey", "옐로우 허니", "Yellow Honey", "옐로우허니", "옐로 허니"],
    },
    {
        "id": "semi_washed",
        "name": "세미 워시드",
        "english_name": "Semi-Washed",
        "aliases": ["semi_washed", "세미 워시드", "Semi-Washed", "semi washed", "세미워시드"],
    },
    {
        "id": "wet_hulled",
        "name": "웻 헐드",
        "english_name": "Wet Hulled",
        "aliases": ["wet_hulled", "웻 헐드", "Wet Hulled", "wet-hulled", "giling basah", "길링 바사"],
    },
    {
        "id": "anaerobic",
        "name": "무산소 발효",
        "english_name": "Anaerobic Fermentation",
        "aliases": [
            "anaerobic",
            "무산소 발효",
            "Anaerobic Fermentation",
            "애너로빅",
            "아나에로빅",
            "무산소",
            "anaerobic natural",
            "anaerobic washed",
        ],
    },
    {
        "id": "carbonic_maceration",
        "name": "카보닉 마세레이션",
        "english_name": "Carbonic Maceration",
        "aliases": [
            "carbonic_maceration",
            "카보닉 마세레이션",
            "Carbonic Maceration",
            "카보닉",
            "carbonic",
        ],
    },
    {
        "id": "double_fermentation",
        "name": "더블 퍼먼테이션",
        "english_name": "Double Fermentation",
        "aliases": [
            "double_fermentation",
            "더블 퍼먼테이션",
            "Double Fermentation",
            "double fermented",
            "이중 발효",
        ],
    },
]
