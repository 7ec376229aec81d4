from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, as carried by a verified session token."""
    user_id: int
    role: str
    name: str = ''

    @classmethod
    def for_user(cls, user) -> 'Identity':
        return cls(user_id=user.pk, role=user.role, name=user.nama_lengkap)

    @property
    def is_admin(self) -> bool:
        return self.role == 'admin'

    @property
    def is_supervisor(self) -> bool:
        return self.role == 'supervisor'

    @property
    def is_participant(self) -> bool:
        return self.role == 'peserta'
