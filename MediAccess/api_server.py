import logging

import uvicorn
from fastapi import FastAPI, Form

from Model.Login import LoginData
from Model.Signup import SignupData
from Settings.config import API_TITLE, API_HOST, API_PORT, LOG_LEVEL
from utils.validators import SignupValidator, LoginValidator

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(title=API_TITLE, description="Validation API for the MediAccess registration and login forms")

signup_validator = SignupValidator()
login_validator = LoginValidator()


def validation_response(error):
    """Build the response body for a validation result"""
    if error is None:
        return {"status": "success", "message": None}
    return {"status": "error", "message": error}


@app.get("/")
async def root():
    """Root endpoint"""
    return {"status": "ok", "service": API_TITLE}


@app.post("/signup/validate")
async def validate_signup(
        full_name: str = Form(""),
        email: str = Form(""),
        password: str = Form(""),
        phone_number: str = Form("")
):
    """Validate the signup form"""
    data = SignupData(full_name=full_name, email=email, password=password, phone_number=phone_number)
    error = signup_validator.validate_signup_data(data)

    if error:
        logger.info(f"Signup form rejected: {error}")
    else:
        logger.info("Signup form accepted")

    return validation_response(error)


@app.post("/login/validate")
async def validate_login(
        email: str = Form(""),
        password: str = Form("")
):
    """Validate the login form"""
    error = login_validator.validate_login_data(LoginData(email=email, password=password))

    if error:
        logger.info(f"Login form rejected: {error}")
    else:
        logger.info("Login form accepted")

    return validation_response(error)


def start_server():
    """Start the FastAPI server"""
    uvicorn.run(app, host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    start_server()
