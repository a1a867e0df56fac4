COUNTRIES = [
    {
        "id": "ethiopia",
        "name": "에티오피아",
        "english_name": "Ethiopia",
        "aliases": ["ethiopia", "에티오피아", "Ethiopia", "이디오피아", "에디오피아", "ethiopian"],
    },
    {
        "id": "colombia",
        "name": "콜롬비아",
        "english_name": "Colombia",
        "aliases": ["colombia", "콜롬비아", "Colombia", "컬럼비아", "columbia", "colombian"],
    },
    {
        "id": "brazil",
        "name": "브라질",
        "english_name": "Brazil",
        "aliases": ["brazil", "브라질", "Brazil", "brasil", "brazilian"],
    },
    {
        "id": "kenya",
        "name": "케냐",
        "english_name": "Kenya",
        "aliases": ["kenya", "케냐", "Kenya", "kenyan"],
    },
    {
        "id": "guatemala",
        "name": "과테말라",
        "english_name": "Guatemala",
        "aliases": ["guatemala", "과테말라", "Guatemala", "과테멀라"],
    },
    {
        "id": "costa_rica",
        "name": "코스타리카",
        "english_name": "Costa Rica",
        "aliases": ["costa_rica", "코스타리카", "Costa Rica", "costarica", "코스타 리카"],
    },
    {
        "id": "panama",
        "name": "파나마",
        "english_name": "Panama",
        "aliases": ["panama", "파나마", "Panama", "panamá"],
    },
    {
        "id": "honduras",
        "name": "온두라스",
        "english_name": "Honduras",
        "aliases": ["honduras", "온두라스", "Honduras", "혼두라스"],
    },
    {
        "id": "el_salvador",
        "name": "엘살바도르",
        "english_name": "El Salvador",
        "aliases": ["el_salvador", "엘살바도르", "El Salvador", "엘 살바도르", "salvador"],
    },
    {
        "id": "nicaragua",
        "name": "니카라과",
        "english_name": "Nicaragua",
        "aliases": ["nicaragua", "니카라과", "Nicaragua", "니카라구아"],
    },
    {
        "id": "mexico",
        "name": "멕시코",
        "english_name": "Mexico",
        "aliases": ["mexico", "멕시코", "Mexico", "méxico"],
    },
    {
        "id": "peru",
        "name": "페루",
        "english_name": "Peru",
        "aliases": ["peru", "페루", "Peru", "perú"],
    },
    {
        "id": "bolivia",
        "name": "볼리비아",
        "english_name": "Bolivia",
        "aliases": ["bolivia", "볼리비아", "Bolivia"],
    },
    {
        "id": "ecuador",
        "name": "에콰도르",
        "english_name": "Ecuador",
        "aliases": ["ecuador", "에콰도르", "Ecuador", "에쿠아도르"],
    },
    {
        "id": "rwanda",
        "name": "르완다",
        "english_name": "Rwanda",
        "aliases": ["rwanda", "르완다", "Rwanda", "루완다"],
    },
    {
        "id": "burundi",
        "name": "부룬디",
        "english_name": "Burundi",
        "aliases": ["burundi", "부룬디", "Burundi", "브룬디"],
    },
    {
        "id": "tanzania",
        "name": "탄자니아",
        "english_name": "Tanzania",
        "aliases": ["tanzania", "탄자니아", "Tanzania", "탄지니아"],
    },
    {
        "id": "yemen",
        "name": "예멘",
        "english_name": "Yemen",
        "aliases": ["yemen", "예멘", "Yemen", "mocha yemen", "모카 예멘"],
    },
    {
        "id": "indonesia",
        "name": "인도네시아",
        "english_name": "Indonesia",
        "aliases": ["indonesia", "인도네시아", "Indonesia", "indonesian"],
    },
    {
        "id": "india",
        "name": "인도",
        "english_name": "India",
        "aliases": ["india", "인도", "India", "indian"],
    },
    {
        "id": "vietnam",
        "name": "베트남",
        "english_name": "Vietnam",
        "aliases": ["vietnam", "베트남", "Vietnam", "viet nam", "월남"],
    },
    {
        "id": "china",
        "name": "중국",
        "english_name": "China",
        "aliases": ["china", "중국", "China", "chinese"],
    },
    {
        "id": "papua_new_guinea",
        "name": "파푸아뉴기니",
        "english_name": "Papua New Guinea",
        "aliases": ["papua_new_guinea", "파푸아뉴기니", "Papua New Guinea", "파푸아 뉴기니", "png"],
    },
    {
        "id": "jamaica",
        "name": "자메이카",
        "english_name": "Jamaica",
        "aliases": ["jamaica", "자메이카", "Jamaica", "자마이카"],
    },
]
