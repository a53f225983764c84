"""
Baccarat rules and drawing logic.

Baccarat has fixed drawing rules - no player decisions after betting.
The rules determine when Player and Banker draw a third card.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class BaccaratRules:
    """
    Configuration for a Baccarat session.

    Attributes:
        num_decks: Number of decks in the shoe
        reserve_decks: New rounds are refused once the shoe is down to this
            many (partially filled) decks
        burn: Whether to burn cards after the shuffle
    """
    num_decks: int = 6
    reserve_decks: int = 1
    burn: bool = True

    def __post_init__(self):
        if self.num_decks < 1:
            raise ValueError("Number of decks must be at least 1")
        if self.reserve_decks < 0:
            raise ValueError("Reserve decks must be non-negative")


def player_draws_third_card(player_value: int) -> bool:
    """
    Determine if Player draws a third card.

    Player drawing rules:
    - 0-5: Draw
    - 6-7: Stand
    - 8-9: Natural (no draw)

    Args:
        player_value: Player's two-card total

    Returns:
        True if Player should draw, False otherwise
    """
    return player_value <= 5


def banker_draws_third_card(
    banker_value: int, player_drew: bool, player_third_card: Optional[int]
) -> bool:
    """
    Determine if Banker draws a third card.

    The decision depends on the Banker's two-card total and, for totals 3-6,
    on the pip value of the Player's third card:
      - Banker 0-2: Always draw
      - Banker 3: Draw unless Player's 3rd card is 8
      - Banker 4: Draw if Player's 3rd card is 2-7
      - Banker 5: Draw if Player's 3rd card is 4-7
      - Banker 6: Draw if Player's 3rd card is 6-7
      - Banker 7-9: Stand

    When the Player stood, every conditional band is false, so the Banker
    draws on 0-2 only.

    Args:
        banker_value: Banker's two-card total
        player_drew: Whether Player drew a third card
        player_third_card: Pip value of Player's third card (1-10), or None

    Returns:
        True if Banker should draw, False otherwise
    """
    if banker_value <= 2:
        return True
    if not player_drew or player_third_card is None:
        return False

    if banker_value == 3:
        return player_third_card != 8
    elif banker_value == 4:
        return 2 <= player_third_card <= 7
    elif banker_value == 5:
        return 4 <= player_third_card <= 7
    elif banker_value == 6:
        return 6 <= player_third_card <= 7
    else:
        return False
