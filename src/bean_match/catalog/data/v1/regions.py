# Keyed by country id.
REGIONS = {
    "ethiopia": ["예가체프", "시다마", "구지", "하라르", "리무", "짐마", "벤치 마지", "겔레나 아바야"],
    "colombia": ["후일라", "나리뇨", "카우카", "안티오키아", "톨리마", "킨디오", "산탄데르"],
    "brazil": ["세라도", "술 데 미나스", "모지아나", "바이아", "에스피리투 산투"],
    "kenya": ["니에리", "키리냐가", "키암부", "엠부", "무랑가"],
    "guatemala": ["안티구아", "우에우에테낭고", "아티틀란", "코반", "프라이하네스"],
    "costa_rica": ["타라주", "웨스트 밸리", "센트럴 밸리", "트레스 리오스", "브룬카"],
    "panama": ["보케테", "볼칸", "레나시미엔토"],
    "honduras": ["산타 바바라", "코판", "마르칼라", "오코테페케"],
    "el_salvador": ["산타 아나", "아파네카", "차라테낭고"],
    "rwanda": ["후예", "냐마셰케", "기사가라"],
    "burundi": ["카얀자", "은고지", "키린도"],
    "indonesia": ["수마트라", "아체", "자바", "술라웨시", "발리 킨타마니"],
    "yemen": ["하라즈", "바니 마타르", "하이마"],
}
