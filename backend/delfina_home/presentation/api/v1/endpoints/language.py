"""Display-language preference of the current visitor."""

from fastapi import APIRouter, Depends

from delfina_home.application.schemas import LanguagePreference
from delfina_home.application.services import LanguageContext
from delfina_home.infrastructure.dependencies import get_language_context

router = APIRouter(prefix="/language", tags=["Language"])


@router.get("", response_model=LanguagePreference)
async def get_language(
    context: LanguageContext = Depends(get_language_context),
) -> LanguagePreference:
    return LanguagePreference(language=context.language)


@router.put("", response_model=LanguagePreference)
async def set_language(
    body: LanguagePreference,
    context: LanguageContext = Depends(get_language_context),
) -> LanguagePreference:
    """Switch language; the choice is remembered in a cookie."""
    context.set_language(body.language)
    return LanguagePreference(language=context.language)
