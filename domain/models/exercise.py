"""
Exercise catalog entity.

Exercises are owned by the catalog and only referenced by logged sets;
the analytics core never mutates them.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from domain.models.enums import EquipmentType, MuscleGroup


class Exercise(BaseModel):
    """
    An exercise from the catalog.

    Examples:
        >>> bench = Exercise(
        ...     id="ex_bench",
        ...     name="Barbell Bench Press",
        ...     primary_muscle_group=MuscleGroup.CHEST,
        ...     equipment_type=EquipmentType.BARBELL,
        ... )
        >>> bench.primary_muscle_group.value
        'chest'
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Exercise identifier")
    name: str = Field(..., min_length=1, description="Display name")
    primary_muscle_group: MuscleGroup = Field(
        ..., description="Muscle group credited for every set of this exercise"
    )
    equipment_type: EquipmentType = Field(
        default=EquipmentType.OTHER, description="Equipment category"
    )
    secondary_muscles: List[MuscleGroup] = Field(
        default_factory=list,
        description="Secondary muscles (informational, not counted in balance)",
    )
