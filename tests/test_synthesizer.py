"""
Tests for local fortune synthesis.
"""

from dataclasses import replace
from datetime import date, timedelta

from lucky.astro.zodiac import ZodiacSign
from lucky.content.pools import DEFAULT_POOLS
from lucky.content.selector import make_rng, pick, pick_distinct
from lucky.core.models import UserProfile
from lucky.engine.synthesizer import (
    KEY_ASPECT,
    birth_facts,
    build_seed,
    synthesize_local,
)


class TestSeed:
    """Daily seed construction."""

    def test_format(self, profile, today):
        assert build_seed(profile, today, "水瓶座") == "2024-05-01-小明-水瓶座"

    def test_birth_facts(self, profile):
        facts = birth_facts(profile)
        assert facts.sign is ZodiacSign.AQUARIUS
        assert facts.chinese_zodiac.animal == "马"
        assert facts.life_path.number == "3"


class TestSynthesizeLocal:
    """Deterministic local reports."""

    def test_same_inputs_same_report(self, profile, today):
        assert synthesize_local(profile, today) == synthesize_local(profile, today)

    def test_marked_as_fallback(self, profile, today):
        assert synthesize_local(profile, today).is_fallback is True

    def test_facts_from_birth_date(self, profile, today):
        result = synthesize_local(profile, today)
        assert result.zodiac.sign == "水瓶座"
        assert result.chinese_zodiac.animal == "马"
        assert result.lucky_items.number == "3"

    def test_five_distinct_celebrities(self, profile, today):
        result = synthesize_local(profile, today)
        names = [m.name for m in result.celebrity_match]
        assert len(names) == 5
        assert len(set(names)) == 5

    def test_changes_across_days(self, profile, today):
        reports = {
            synthesize_local(profile, today + timedelta(days=i)).tarot.card_name
            for i in range(30)
        }
        assert len(reports) > 1

    def test_facts_do_not_change_across_days(self, profile, today):
        a = synthesize_local(profile, today)
        b = synthesize_local(profile, today + timedelta(days=1))
        assert a.zodiac == b.zodiac
        assert a.chinese_zodiac == b.chinese_zodiac
        assert a.lucky_items.number == b.lucky_items.number

    def test_name_changes_draws(self, profile, today):
        others = {
            synthesize_local(replace(profile, name=f"用户{i}"), today).daily_affirmation
            for i in range(30)
        }
        assert len(others) > 1

    def test_draw_order(self, profile, today):
        """Reproduce the draw sequence by hand from the same seed."""
        rng = make_rng(build_seed(profile, today, "水瓶座"))
        card = pick(DEFAULT_POOLS.tarot, rng)
        mansion = pick(DEFAULT_POOLS.lunar_mansions, rng)
        food = pick(DEFAULT_POOLS.foods, rng)
        activity = pick(DEFAULT_POOLS.activities, rng)
        movie = pick(DEFAULT_POOLS.movies, rng)
        song = pick(DEFAULT_POOLS.music, rng)
        color = pick(DEFAULT_POOLS.colors, rng)
        item = pick(DEFAULT_POOLS.objects, rng)
        animal = pick(DEFAULT_POOLS.animals, rng)
        celebrities = pick_distinct(DEFAULT_POOLS.celebrities, 5, rng)
        affirmation = pick(DEFAULT_POOLS.affirmations, rng)

        result = synthesize_local(profile, today)
        assert result.tarot.card_name == card.name
        assert result.constellation.star_name == mansion.name
        assert result.lucky_food.food == food.food
        assert result.lucky_activity.action == activity.action
        assert result.daily_movie.title == movie.title
        assert result.daily_music.title == song.title
        assert result.lucky_items.color == color
        assert result.lucky_items.item == item
        assert result.compatible_animal.animal == animal.animal
        assert [m.name for m in result.celebrity_match] == [c.name for c in celebrities]
        assert result.daily_affirmation == affirmation

    def test_astral_chart_is_templated(self, profile, today):
        chart = synthesize_local(profile, today).astral_chart
        assert chart.key_aspect == KEY_ASPECT
        assert profile.name in chart.analysis
        assert "水瓶座" in chart.analysis

    def test_mbti_inferred_from_zodiac(self, profile, today):
        # Aquarius defaults to INTP
        assert synthesize_local(profile, today).mbti_analysis.type == "INTP"

    def test_mbti_given(self, mbti_profile, today):
        analysis = synthesize_local(mbti_profile, today).mbti_analysis
        assert analysis.type == "INFP"
        assert analysis.superpower

    def test_every_sign_synthesizes(self, today):
        day = date(2001, 1, 1)
        signs = set()
        while day.year == 2001:
            user = UserProfile(name="测试", birth_date=day.isoformat())
            signs.add(synthesize_local(user, today).zodiac.sign)
            day += timedelta(days=11)
        assert signs == {s.value for s in ZodiacSign}

    def test_to_dict_uses_camel_case(self, profile, today):
        data = synthesize_local(profile, today).to_dict()
        assert data["isFallback"] is True
        assert "luckyTrait" in data["zodiac"]
        assert "secretStrength" in data["chineseZodiac"]
        assert "romanticVibe" in data["celebrityMatch"][0]
        assert "dailyAffirmation" in data
        assert "lucky_items" not in data


class TestPools:
    """Static content integrity."""

    def test_celebrity_pool_large_enough(self):
        assert len(DEFAULT_POOLS.celebrities) >= 5
        names = [c.name for c in DEFAULT_POOLS.celebrities]
        assert len(names) == len(set(names))

    def test_no_empty_pools(self):
        for pool in (
            DEFAULT_POOLS.tarot,
            DEFAULT_POOLS.lunar_mansions,
            DEFAULT_POOLS.foods,
            DEFAULT_POOLS.activities,
            DEFAULT_POOLS.movies,
            DEFAULT_POOLS.music,
            DEFAULT_POOLS.colors,
            DEFAULT_POOLS.objects,
            DEFAULT_POOLS.animals,
            DEFAULT_POOLS.affirmations,
            DEFAULT_POOLS.share_hooks,
        ):
            assert len(pool) > 0
