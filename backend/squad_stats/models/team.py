from datetime import datetime, timezone
from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey
from sqlalchemy.orm import relationship
from squad_stats.db.base import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Team(Base):
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)  # "UNAI Eagles"
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)

    # roster, in the order players were added
    players = relationship(
        "RosterPlayer",
        back_populates="team",
        cascade="all, delete-orphan",
        order_by="RosterPlayer.id",
        lazy="selectin",
    )


class RosterPlayer(Base):
    __tablename__ = "roster_players"

    id = Column(Integer, primary_key=True)
    team_id = Column(
        Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True
    )

    name = Column(Text, nullable=False)
    number = Column(Integer)  # jersey number
    position = Column(Text)  # "PG", "C", ...

    team = relationship("Team", back_populates="players")
