from models import InvalidMessage

# Permitted radar distance scales; compared with exact float equality
DISTANCE_SCALES = (0.125, 0.25, 0.5, 1.5, 3.0, 6.0, 12.0, 24.0, 48.0, 96.0)


def check_rsd(rsd):
    """Return an InvalidMessage if the RSD distance scale is not permitted, else None."""
    if rsd.distance_scale not in DISTANCE_SCALES:
        return InvalidMessage(
            received_at=rsd.received_at,
            info_msg=f"RSD message. Wrong distance scale value: {rsd.distance_scale}"
        )
    return None
