# Keyed by the exact region display name used in REGIONS.
FARMS = {
    "예가체프": ["코체레", "아리차", "이디도", "콩가", "첼베사", "할로 베리티"],
    "시다마": ["벤사", "부레 오로모", "아로레사"],
    "구지": ["함벨라 농장", "샤키소", "우라가"],
    "후일라": ["라 에스페란사", "엘 미라도르", "산 아구스틴", "로스 노갈레스"],
    "나리뇨": ["라 플로리다", "부에사코"],
    "세라도": ["다테라 농장", "파젠다 우마리사우", "파젠다 산타 루시아"],
    "술 데 미나스": ["파젠다 산타 이네스", "파젠다 다 린하"],
    "니에리": ["가타이티 팩토리", "기카라 팩토리", "카루타 팩토리"],
    "키리냐가": ["카리누 팩토리", "키앙고이 팩토리"],
    "안티구아": ["산 세바스티안", "라 플로르 델 카페", "산타 클라라"],
    "우에우에테낭고": ["엘 인헤르토", "라 리베르타드"],
    "타라주": ["라 미니타", "돈 마요"],
    "웨스트 밸리": ["라스 라하스", "헤르사 농장"],
    "보케테": ["Hacienda La Esmeralda", "Elida Estate", "Janson Coffee Farm", "Carmen Estate"],
    "볼칸": ["Finca Deborah", "Hartmann Estate"],
    "산타 바바라": ["엘 푸에르토", "엘 세드랄"],
    "후예": ["후예 마운틴 워싱 스테이션", "가소도 워싱 스테이션"],
    "수마트라": ["와하나 농장", "가요 마운틴"],
}
