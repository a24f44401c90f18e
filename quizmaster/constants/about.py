"""Static metadata describing QuizMaster."""

APP_NAME = "DevOps QuizMaster"
APP_VERSION = "1.0.4"
APP_BUILD = "v1.0.4-build.291"
APP_LICENSE = "MIT License"
APP_POWERED_BY = "Powered by Google Gemini 2.5 Flash"
APP_TAGLINE = "Generate AI-powered quizzes to validate your pipeline knowledge."
APP_ABOUT_TEXT = (
    "DevOps QuizMaster generates multiple-choice quizzes on any technical topic with "
    "Google Gemini, scores your answers, and keeps a local history of your results."
)
