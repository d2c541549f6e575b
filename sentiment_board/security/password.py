import bcrypt

# bcrypt ne lit que les 72 premiers octets (et bcrypt>=5 refuse au-delà)
PASSWORD_MAX_BYTES = 72


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode(), hashed_password.encode())
    except ValueError:
        # hash illisible (ex: mot de passe stocké en clair)
        return False
