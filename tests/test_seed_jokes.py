from seed_jokes import JOKES, seed

from app.models import Joke


def test_seed_skips_jokes_already_present(TestingSessionLocal):
    with TestingSessionLocal() as db:
        db.add(Joke(question=JOKES[0]["question"], answer="Kept answer"))
        db.commit()

        added = seed(db)

        assert added == len(JOKES) - 1
        assert db.query(Joke).count() == len(JOKES)
        kept = db.query(Joke).filter(Joke.question == JOKES[0]["question"]).one()
        assert kept.answer == "Kept answer"


def test_seed_is_idempotent(TestingSessionLocal):
    with TestingSessionLocal() as db:
        assert seed(db) == len(JOKES)
        assert seed(db) == 0
        assert db.query(Joke).count() == len(JOKES)
