"""
Hand-maintained alias overrides per language.

Each table maps a localized phrase back to the English spec it stands for.
They cover phrases the upstream catalogs omit or render differently from
what the editor shows: the turn-direction and green-flag blocks, whose
icons are part of the spec, and the script terminator ``end``, which the
catalogs do not ship at all.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

TURN_RIGHT: Final[str] = "turn @turnRight %n degrees"
TURN_LEFT: Final[str] = "turn @turnLeft %n degrees"
GREEN_FLAG: Final[str] = "when @greenFlag clicked"
END: Final[str] = "end"

_EXTRA_ALIASES: dict[str, dict[str, str]] = {
    "de": {
        "drehe dich nach rechts um %n Grad": TURN_RIGHT,
        "drehe dich nach links um %n Grad": TURN_LEFT,
        "Wenn die grüne Flagge angeklickt": GREEN_FLAG,
        "Ende": END,
    },
    "es": {
        "girar a la derecha %n grados": TURN_RIGHT,
        "girar a la izquierda %n grados": TURN_LEFT,
        "al presionar bandera verde": GREEN_FLAG,
        "fin": END,
    },
    "fr": {
        "tourner droite de %n degrés": TURN_RIGHT,
        "tourner gauche de %n degrés": TURN_LEFT,
        "quand le drapeau vert pressé": GREEN_FLAG,
        "fin": END,
    },
    "zh_CN": {
        "右转 %n 度": TURN_RIGHT,
        "左转 %n 度": TURN_LEFT,
        "当绿旗被点击": GREEN_FLAG,
        "结束": END,
    },
    "zh_TW": {
        "右轉 %n 度": TURN_RIGHT,
        "左轉 %n 度": TURN_LEFT,
        "當綠旗被點擊": GREEN_FLAG,
        "結束": END,
    },
    "pl": {
        "obróć w prawo o %n stopni": TURN_RIGHT,
        "obróć w lewo o %n stopni": TURN_LEFT,
        "kiedy kliknięto zieloną flagę": GREEN_FLAG,
        "koniec": END,
    },
    "ja": {
        "右に %n 度回す": TURN_RIGHT,
        "左に %n 度回す": TURN_LEFT,
        "緑の旗がクリックされたとき": GREEN_FLAG,
        "終わる": END,
    },
    "nl": {
        "draai %n graden naar rechts": TURN_RIGHT,
        "draai %n graden naar links": TURN_LEFT,
        "wanneer groene vlag wordt aangeklikt": GREEN_FLAG,
        "einde": END,
    },
    "pt": {
        "gira %n graus para a direita": TURN_RIGHT,
        "gira %n graus para a esquerda": TURN_LEFT,
        "quando alguém clicar na bandeira verde": GREEN_FLAG,
        "fim": END,
    },
    "it": {
        "ruota a destra di %n gradi": TURN_RIGHT,
        "ruota a sinistra di %n gradi": TURN_LEFT,
        "quando si clicca sulla bandiera verde": GREEN_FLAG,
        "fine": END,
    },
    "he": {
        "הסתובב ימינה %n מעלות": TURN_RIGHT,
        "הסתובב שמאלה %n מעלות": TURN_LEFT,
        "כאשר לוחצים על דגל ירוק": GREEN_FLAG,
        "סוף": END,
    },
    "ko": {
        "오른쪽으로 %n 도 돌기": TURN_RIGHT,
        "왼쪽으로 %n 도 돌기": TURN_LEFT,
        "녹색 깃발을 클릭했을 때": GREEN_FLAG,
        "끝": END,
    },
    "nb": {
        "snu høyre %n grader": TURN_RIGHT,
        "snu venstre %n grader": TURN_LEFT,
        "når grønt flagg klikkes": GREEN_FLAG,
        "slutt": END,
    },
    "tr": {
        "%n derece sağa dön": TURN_RIGHT,
        "%n derece sola dön": TURN_LEFT,
        "yeşil bayrak tıklandığında": GREEN_FLAG,
        "son": END,
    },
    "el": {
        "στρίψε δεξιά %n μοίρες": TURN_RIGHT,
        "στρίψε αριστερά %n μοίρες": TURN_LEFT,
        "όταν γίνει κλικ στην πράσινη σημαία": GREEN_FLAG,
        "τέλος": END,
    },
    "ru": {
        "повернуть вправо на %n градусов": TURN_RIGHT,
        "повернуть влево на %n градусов": TURN_LEFT,
        "когда щёлкнут по зелёному флагу": GREEN_FLAG,
        "конец": END,
    },
    "ca": {
        "gira a la dreta %n graus": TURN_RIGHT,
        "gira a l'esquerra %n graus": TURN_LEFT,
        "quan la bandera verda es premi": GREEN_FLAG,
        "fi": END,
    },
    "id": {
        "putar kanan %n derajat": TURN_RIGHT,
        "putar kiri %n derajat": TURN_LEFT,
        "ketika bendera hijau diklik": GREEN_FLAG,
    },
}

EXTRA_ALIASES: Final[Mapping[str, Mapping[str, str]]] = MappingProxyType(
    {lang: MappingProxyType(table) for lang, table in _EXTRA_ALIASES.items()}
)
