"""Tests for the Pokemon dataclass."""

import dataclasses

import pytest

from poke_team.models.pokemon import MAX_TEAM_SIZE, Pokemon


class TestPokemon:
    """Tests for Pokemon construction and identity."""

    def test_types_stored_as_tuple(self):
        """Types given as a list should be frozen into a tuple, order kept."""
        pokemon = Pokemon(id=1, name="Bulbasaur", sprite="bulbasaur.png", types=["Grass", "Poison"])

        assert pokemon.types == ("Grass", "Poison")

    def test_is_immutable(self):
        """Fields cannot be reassigned after construction."""
        pokemon = Pokemon(id=1, name="Bulbasaur")

        with pytest.raises(dataclasses.FrozenInstanceError):
            pokemon.name = "Ivysaur"

    def test_same_as_compares_ids_only(self):
        """Two entries with the same id are the same team member."""
        original = Pokemon(id=25, name="Pikachu", sprite="a.png", types=("Electric",))
        reshaped = Pokemon(id=25, name="PIKACHU", sprite="b.png", types=())
        other = Pokemon(id=26, name="Raichu")

        assert original.same_as(reshaped)
        assert not original.same_as(other)

    def test_string_ids(self):
        """Identifiers may be strings."""
        assert Pokemon(id="mew", name="Mew").same_as(Pokemon(id="mew", name="Mew"))

    def test_dict_conversion(self):
        """to_dict/from_dict use the JSON shape of the HTTP API."""
        data = {"id": 4, "name": "Charmander", "sprite": "charmander.png", "types": ["Fire"]}

        pokemon = Pokemon.from_dict(data)

        assert pokemon == Pokemon(id=4, name="Charmander", sprite="charmander.png", types=("Fire",))
        assert pokemon.to_dict() == data

    def test_from_dict_defaults(self):
        """Missing or null sprite/types fall back to empty values."""
        pokemon = Pokemon.from_dict({"id": 4, "name": "Charmander", "sprite": None})

        assert pokemon.sprite == ""
        assert pokemon.types == ()

    def test_max_team_size(self):
        assert MAX_TEAM_SIZE == 6
