from pydantic import BaseModel, ConfigDict, model_validator


class TokenClaims(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: str

    @model_validator(mode="before")
    @classmethod
    def _registered_claim_types(cls, data):
        # PyJWT refuses to sign or read back these names with other types.
        if not isinstance(data, dict):
            return data
        if "iss" in data and not isinstance(data["iss"], str):
            raise ValueError("iss must be a string")
        aud = data.get("aud")
        if aud is not None and not isinstance(aud, str):
            if not (isinstance(aud, list) and all(isinstance(a, str) for a in aud)):
                raise ValueError("aud must be a string or a list of strings")
        nbf = data.get("nbf")
        if nbf is not None and (isinstance(nbf, bool) or not isinstance(nbf, (int, float))):
            raise ValueError("nbf must be a number")
        return data


class TokenIssued(BaseModel):
    successToken: bool = True


class TokenCleared(BaseModel):
    clearToken: str = "Success"
