VARIETIES = [
    {
        "id": "geisha",
        "name": "게이샤",
        "english_name": "Geisha",
        "aliases": ["geisha", "게이샤", "Geisha", "gesha", "게샤", "게이사"],
    },
    {
        "id": "bourbon",
        "name": "버번",
        "english_name": "Bourbon",
        "aliases": ["bourbon", "버번", "Bourbon", "부르봉", "red bourbon", "레드 버번"],
    },
    {
        "id": "yellow_bourbon",
        "name": "옐로우 버번",
        "english_name": "Yellow Bourbon",
        "aliases": ["yellow_bourbon", "옐로우 버번", "Yellow Bourbon", "옐로 버번", "bourbon amarelo"],
    },
    {
        "id": "pink_bourbon",
        "name": "핑크 버번",
        "english_name": "Pink Bourbon",
        "aliases": ["pink_bourbon", "핑크 버번", "Pink Bourbon", "bourbon rosado"],
    },
    {
        "id": "typica",
        "name": "티피카",
        "english_name": "Typica",
        "aliases": ["typica", "티피카", "Typica", "타이피카"],
    },
    {
        "id": "caturra",
        "name": "카투라",
        "english_name": "Caturra",
        "aliases": ["caturra", "카투라", "Caturra", "카투라종"],
    },
    {
        "id": "catuai",
        "name": "카투아이",
        "english_name": "Catuai",
        "aliases": ["catuai", "카투아이", "Catuai", "catuaí", "yellow catuai", "red catuai"],
    },
    {
        "id": "castillo",
        "name": "카스티요",
        "english_name": "Castillo",
        "aliases": ["castillo", "카스티요", "Castillo", "카스티조", "카스티요종"],
    },
    {
        "id": "pacamara",
        "name": "파카마라",
        "english_name": "Pacamara",
        "aliases": ["pacamara", "파카마라", "Pacamara"],
    },
    {
        "id": "sl28",
        "name": "SL28",
        "english_name": "SL28",
        "aliases": ["sl28", "SL28", "sl-28", "sl 28"],
    },
    {
        "id": "sl34",
        "name": "SL34",
        "english_name": "SL34",
        "aliases": ["sl34", "SL34", "sl-34", "sl 34"],
    },
    {
        "id": "heirloom",
        "name": "에어룸",
        "english_name": "Ethiopian Heirloom",
        "aliases": [
            "heirloom",
            "에어룸",
            "Ethiopian Heirloom",
            "에티오피안 에어룸",
            "토착종",
            "landrace",
            "ethiopian landrace",
        ],
    },
    {
        "id": "sidra",
        "name": "시드라",
        "english_name": "Sidra",
        "aliases": ["sidra", "시드라", "Sidra"],
    },
    {
        "id": "mundo_novo",
        "name": "문도 노보",
        "english_name": "Mundo Novo",
        "aliases": ["mundo_novo", "문도 노보", "Mundo Novo", "문도노보"],
    },
    {
        "id": "maragogype",
        "name": "마라고지페",
        "english_name": "Maragogype",
        "aliases": ["maragogype", "마라고지페", "Maragogype", "maragogipe", "마라고지프"],
    },
    {
        "id": "java",
        "name": "자바",
        "english_name": "Java",
        "aliases": ["java", "자바", "Java", "자바종"],
    },
    {
        "id": "catimor",
        "name": "카티모르",
        "english_name": "Catimor",
        "aliases": ["catimor", "카티모르", "Catimor", "카티모"],
    },
    {
        "id": "villa_sarchi",
        "name": "비야 사르치",
        "english_name": "Villa Sarchi",
        "aliases": ["villa_sarchi", "비야 사르치", "Villa Sarchi", "빌라 사르치", "villa sarchí"],
    },
    {
        "id": "wush_wush",
        "name": "우시우시",
        "english_name": "Wush Wush",
        "aliases": ["wush_wush", "우시우시", "Wush Wush", "우쉬우쉬", "wushwush"],
    },
    {
        "id": "ruiru_11",
        "name": "루이루 11",
        "english_name": "Ruiru 11",
        "aliases": ["ruiru_11", "루이루 11", "Ruiru 11", "ruiru11"],
    },
]
