"""Discharge curve profile routes."""
from fastapi import APIRouter, HTTPException, Query, status

from battery_core.profiles import get_profile, list_profiles
from schemas.battery import CurveConfig, ProfileEvaluation, ProfileResponse

router = APIRouter(tags=["profiles"])


def _get_profile_or_404(name: str):
    try:
        return get_profile(name)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Profile {name} not found")


@router.get("/profiles", response_model=list[ProfileResponse])
def list_all_profiles() -> list[ProfileResponse]:
    """List built-in curve presets."""
    return [
        ProfileResponse(name=name, curve=CurveConfig.from_curve(curve))
        for name, curve in list_profiles().items()
    ]


@router.get("/profiles/{name}", response_model=ProfileResponse)
def get_profile_detail(name: str) -> ProfileResponse:
    curve = _get_profile_or_404(name)
    return ProfileResponse(name=name, curve=CurveConfig.from_curve(curve))


@router.get("/profiles/{name}/evaluate", response_model=ProfileEvaluation)
def evaluate_profile(name: str, voltage: float = Query(...)) -> ProfileEvaluation:
    """Percentage for a voltage on the profile's curve."""
    curve = _get_profile_or_404(name)
    return ProfileEvaluation(profile=name, voltage=voltage, percentage=curve.apply(voltage))
