"""
Weekly volume landmarks per muscle group.

Set-count landmarks: maintenance volume (MV), minimum effective volume
(MEV), maximum adaptive volume range (MAV) and maximum recoverable volume
(MRV). Values are weekly working sets.
"""
from dataclasses import dataclass
from typing import Dict

from domain.models import MuscleGroup


@dataclass(frozen=True)
class VolumeLandmark:
    mv: int
    mev: int
    mav_min: int
    mav_max: int
    mrv: int


@dataclass(frozen=True)
class VolumeStatus:
    status: str  # below_mev, mev, mav, approaching_mrv, over_mrv
    message: str


VOLUME_LANDMARKS: Dict[MuscleGroup, VolumeLandmark] = {
    MuscleGroup.CHEST: VolumeLandmark(mv=6, mev=8, mav_min=12, mav_max=20, mrv=22),
    MuscleGroup.BACK: VolumeLandmark(mv=6, mev=8, mav_min=14, mav_max=22, mrv=25),
    MuscleGroup.SHOULDERS: VolumeLandmark(mv=4, mev=6, mav_min=12, mav_max=20, mrv=22),
    MuscleGroup.BICEPS: VolumeLandmark(mv=4, mev=6, mav_min=10, mav_max=16, mrv=20),
    MuscleGroup.TRICEPS: VolumeLandmark(mv=4, mev=6, mav_min=10, mav_max=16, mrv=18),
    MuscleGroup.QUADS: VolumeLandmark(mv=6, mev=8, mav_min=12, mav_max=18, mrv=20),
    MuscleGroup.HAMSTRINGS: VolumeLandmark(mv=4, mev=6, mav_min=10, mav_max=16, mrv=18),
    MuscleGroup.GLUTES: VolumeLandmark(mv=4, mev=6, mav_min=10, mav_max=16, mrv=18),
    MuscleGroup.CALVES: VolumeLandmark(mv=6, mev=8, mav_min=12, mav_max=16, mrv=20),
    MuscleGroup.CORE: VolumeLandmark(mv=0, mev=0, mav_min=6, mav_max=12, mrv=16),
    MuscleGroup.FOREARMS: VolumeLandmark(mv=2, mev=4, mav_min=6, mav_max=10, mrv=14),
}


def volume_status(muscle_group: MuscleGroup, weekly_set_count: int) -> VolumeStatus:
    """
    Classify a weekly set count against the muscle group's landmarks.

    Args:
        muscle_group: Muscle group being trained
        weekly_set_count: Working sets for that group this week

    Returns:
        VolumeStatus with a status key and a display message
    """
    vl = VOLUME_LANDMARKS[MuscleGroup(muscle_group)]
    n = weekly_set_count

    if n < vl.mev:
        return VolumeStatus("below_mev", f"{n} sets -- below minimum effective volume ({vl.mev})")
    if n < vl.mav_min:
        return VolumeStatus("mev", f"{n} sets -- at minimum effective volume")
    if n <= vl.mav_max:
        return VolumeStatus("mav", f"{n} sets -- in optimal range ({vl.mav_min}-{vl.mav_max})")
    if n <= vl.mrv:
        return VolumeStatus(
            "approaching_mrv", f"{n} sets -- approaching max recoverable volume ({vl.mrv})"
        )
    return VolumeStatus(
        "over_mrv", f"{n} sets -- over max recoverable volume ({vl.mrv}), consider a deload"
    )
