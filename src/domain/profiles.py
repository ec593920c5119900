import logging
import os
from pathlib import Path

import tomlkit

from domain.models import RenderSettings
from shared.constants import APP_HOME_ENV, APP_NAME

logger = logging.getLogger(__name__)


def user_base_dir() -> Path:
    """Base directory for user data: $ISORASTER_HOME or ~/.isoraster."""
    env = os.getenv(APP_HOME_ENV)
    if env:
        return Path(env)
    return Path.home() / f'.{APP_NAME}'


def _user_profiles_dir() -> Path:
    """
    Determine profiles directory.

    1) If $ISORASTER_HOME is unset and <project_root>/configs/profiles exists,
       use it (run-from-repo setups).
    2) Otherwise, fall back to <user base>/configs/profiles.
    """
    project_root = Path(__file__).resolve().parent.parent.parent
    local_profiles = project_root / 'configs' / 'profiles'
    if local_profiles.exists() and not os.getenv(APP_HOME_ENV):
        return local_profiles
    return user_base_dir() / 'configs' / 'profiles'


def ensure_profiles_dir() -> Path:
    profiles_dir = _user_profiles_dir()
    profiles_dir.mkdir(parents=True, exist_ok=True)
    return profiles_dir


def list_profiles() -> list[str]:
    """Список имён профилей без расширения."""
    folder = ensure_profiles_dir()
    return sorted(p.stem for p in folder.glob('*.toml') if p.is_file())


def profile_path(name: str) -> Path:
    """Путь к файлу профиля по имени."""
    return ensure_profiles_dir() / f'{name}.toml'


def load_profile(name_or_path: str) -> RenderSettings:
    """
    Загрузка и валидация профиля TOML -> RenderSettings.

    Поддерживает как имя профиля (без .toml) из каталога profiles,
    так и абсолютный/относительный путь до TOML файла.
    """
    p = Path(name_or_path)
    path = (
        p if p.suffix.lower() == '.toml' and p.exists() else profile_path(name_or_path)
    )
    if not path.exists():
        msg = f'Профиль не найден: {path}'
        raise FileNotFoundError(msg)
    text = path.read_text(encoding='utf-8')
    data = tomlkit.parse(text).unwrap()

    settings = RenderSettings.model_validate(data)
    logger.info(
        'Profile %s loaded: grid=%dx%d scale=%d style=%s frames=%d',
        path.name,
        settings.grid_width,
        settings.grid_height,
        settings.scale,
        settings.line_style.value,
        settings.frames,
    )
    return settings


def save_profile(name: str, settings: RenderSettings) -> Path:
    """Сохранение профиля в TOML (без атомарности и бэкапов)."""
    path = profile_path(name)
    data = settings.model_dump(mode='json')
    doc = tomlkit.document()
    blobs = data.pop('blobs')
    for key, value in data.items():
        doc.add(key, value)
    aot = tomlkit.aot()
    for blob in blobs:
        aot.append(tomlkit.item(blob))
    doc.add('blobs', aot)
    path.write_text(tomlkit.dumps(doc), encoding='utf-8')
    logger.info('Profile saved: %s', path)
    return path


def delete_profile(name: str) -> None:
    """Удаление файла профиля, если он существует."""
    path = profile_path(name)
    if path.exists():
        path.unlink()
