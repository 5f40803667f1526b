from sqlalchemy import Column, Integer, Float, Text, Date, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from squad_stats.db.base import Base

# counters tracked for every player in a box score
STAT_FIELDS = ("points", "rebounds", "assists", "steals", "blocks", "minutes")


class Game(Base):
    __tablename__ = "games"

    id = Column(Integer, primary_key=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)

    opponent = Column(Text, nullable=False)
    game_date = Column(Date, nullable=False, index=True)
    is_finished = Column(Boolean, nullable=False, default=False)

    # box score, kept in the order the client sent it
    stat_lines = relationship(
        "GameStatLine",
        back_populates="game",
        cascade="all, delete-orphan",
        order_by="GameStatLine.id",
        lazy="selectin",
    )


class GameStatLine(Base):
    __tablename__ = "game_stat_lines"

    id = Column(Integer, primary_key=True)
    game_id = Column(
        Integer, ForeignKey("games.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # optional link to the roster entry, the name below is a snapshot
    player_id = Column(
        Integer, ForeignKey("roster_players.id", ondelete="SET NULL"), nullable=True
    )

    name = Column(Text, nullable=False, index=True)
    number = Column(Integer)

    points = Column(Float, nullable=False, default=0)
    rebounds = Column(Float, nullable=False, default=0)
    assists = Column(Float, nullable=False, default=0)
    steals = Column(Float, nullable=False, default=0)
    blocks = Column(Float, nullable=False, default=0)
    minutes = Column(Float, nullable=False, default=0)
    seconds_played = Column(Float, nullable=False, default=0)  # live game clock

    game = relationship("Game", back_populates="stat_lines")
