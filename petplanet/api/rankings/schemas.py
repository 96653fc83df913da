# petplanet/api/rankings/schemas.py
from marshmallow import EXCLUDE, Schema, fields, validate

from petplanet.api.pets.schemas import PetSchema
from petplanet.models.enums import RankingCategory, values


class VoteSchema(Schema):
    petId = fields.Str(required=True)
    category = fields.Str(load_default=RankingCategory.CUTE.value, validate=validate.OneOf(values(RankingCategory)))

    class Meta:
        unknown = EXCLUDE


class RankingSchema(Schema):
    rank = fields.Int()
    category = fields.Str()
    votes = fields.Int(dump_default=0)
    pet = fields.Method("get_pet")

    def get_pet(self, obj):
        pet = obj.get('pet')
        if isinstance(pet, dict):
            return PetSchema(only=('id', 'name', 'species', 'breed', 'avatar')).dump(pet)
        return {'id': str(pet) if pet is not None else None}
