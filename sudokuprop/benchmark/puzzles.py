"""Built-in puzzle collections, grouped by level."""

from typing import Dict, List

PUZZLES: Dict[str, List[str]] = {
    "easy": [
        "530070000600195000098000060800060003400803001700020006060000280000419005000080079",
        "003020600900305001001806400008102900700000008006708200002609500800203009005010300",
    ],
    "medium": [
        "120000050800400030000050948013200000400503007000001820731080000040006009060000084",
        "100030002903040600200000300000308700010207030006904000001000009004070501600080003",
        "090000000183090000065001700000170200010208090004035000006700340000010586000000020",
    ],
    "hard": [
        "480006007300002490000004020000300281000000000731005000090700000043500009100600053",
        "006000300435009007701600000870002010000000000060900082000006105900100276007000800",
    ],
    "extreme": [
        # AI Escargot
        "100007090030020008009600500005300900010080002600004000300000010040000007007000300",
        # Easter Monster
        "100000002090400050006000700050903000000070000000850040700000600030009080002000001",
        # Platinum Blonde
        "000000012000000003002300400001800005060070800000009000008500000900040500470006000",
    ],
}

LEVELS = list(PUZZLES)
