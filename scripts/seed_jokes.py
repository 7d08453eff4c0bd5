import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.database import SessionLocal, init_db
from app.models import Joke


JOKES = [
    {"question": "Quelle est la femelle du hamster ?", "answer": "L'amsterdam"},
    {"question": "Que dit un oignon quand il se cogne ?", "answer": "Aïe"},
    {"question": "Quel est l'animal le plus heureux ?", "answer": "Le hibou, parce que sa femme est chouette."},
    {"question": "Pourquoi le football c'est rigolo ?", "answer": "Parce que Thierry en rit"},
    {"question": "Quel est le sport le plus fruité ?", "answer": "La boxe, parce que tu te prends des pêches dans la poire et tu tombes dans les pommes."},
    {"question": "Que se fait un Schtroumpf quand il tombe ?", "answer": "Un Bleu"},
    {"question": "Quel est le comble pour un marin ?", "answer": "Avoir le nez qui coule"},
    {"question": "Qu'est ce que les enfants usent le plus à l'école ?", "answer": "Le professeur"},
    {"question": "Quel est le sport le plus silencieux ?", "answer": "Le para-chuuuut"},
    {"question": "Quel est le comble pour un joueur de bowling ?", "answer": "C'est de perdre la boule"},
]


def seed(session, jokes=JOKES) -> int:
    """Insert the jokes whose question is not stored yet; returns how many were added."""
    added = 0
    for joke_data in jokes:
        existing = session.query(Joke).filter(Joke.question == joke_data["question"]).first()
        if existing:
            continue
        session.add(Joke(**joke_data))
        added += 1
    session.commit()
    return added


def main() -> None:
    init_db()
    session = SessionLocal()
    try:
        added = seed(session)
        print(f"Seeded {added} new jokes ({len(JOKES)} total in seed list)")
    finally:
        session.close()


if __name__ == "__main__":
    main()
