"""Cleanup target definitions for mac-cleanup."""

from typing import Optional

from mac_cleanup.config import Settings
from mac_cleanup.external import has_command
from mac_cleanup.models import CleanupTarget, TargetMode
from mac_cleanup.scanner import expand_path

_STEAM = "~/Library/Application Support/Steam"
_MINECRAFT = "~/Library/Application Support/minecraft"
_TEAMS = "~/Library/Application Support/Microsoft/Teams"

# Targets run in this order, once per run
TARGETS: list[CleanupTarget] = [
    # =============================================================================
    # SYSTEM
    # =============================================================================
    CleanupTarget(
        id="trash",
        message="Emptying the Trash on all mounted volumes and the main HDD...",
        patterns=["/Volumes/*/.Trashes/*", "~/.Trash/*"],
        privileged=True,
    ),
    CleanupTarget(
        id="system_caches",
        message="Clearing System Cache Files...",
        patterns=[
            "/Library/Caches/*",
            "/System/Library/Caches/*",
            "~/Library/Caches/*",
            "/private/var/folders/bh/*/*/*/*",
        ],
        privileged=True,
    ),
    CleanupTarget(
        id="system_logs",
        message="Clearing System Log Files...",
        patterns=[
            "/private/var/log/asl/*.asl",
            "/Library/Logs/DiagnosticReports/*",
            "/Library/Logs/CreativeCloud/*",
            "/Library/Logs/Adobe/*",
            "/Library/Logs/adobegc.log",
            "~/Library/Containers/com.apple.mail/Data/Library/Logs/Mail/*",
            "~/Library/Logs/CoreSimulator/*",
        ],
        privileged=True,
    ),
    CleanupTarget(
        id="adobe_cache",
        message="Clearing Adobe Cache Files...",
        patterns=["~/Library/Application Support/Adobe/Common/Media Cache Files/*"],
    ),
    # =============================================================================
    # APPLE DEVICES & XCODE
    # =============================================================================
    CleanupTarget(
        id="ios_apps",
        message="Cleaning up iOS Applications...",
        patterns=["~/Music/iTunes/iTunes Media/Mobile Applications/*"],
    ),
    CleanupTarget(
        id="ios_backups",
        message="Removing iOS Device Backups...",
        patterns=["~/Library/Application Support/MobileSync/Backup/*"],
    ),
    CleanupTarget(
        id="xcode",
        message="Cleaning up XCode Derived Data and Archives...",
        patterns=[
            "~/Library/Developer/Xcode/DerivedData/*",
            "~/Library/Developer/Xcode/Archives/*",
            "~/Library/Developer/Xcode/iOS Device Logs/*",
        ],
    ),
    CleanupTarget(
        id="ios_simulators",
        message="Cleaning up iOS Simulators...",
        mode=TargetMode.EXTERNAL,
        requires_command="xcrun",
        commands=[
            ["osascript", "-e", 'tell application "com.apple.CoreSimulator.CoreSimulatorService" to quit'],
            ["osascript", "-e", 'tell application "iOS Simulator" to quit'],
            ["osascript", "-e", 'tell application "Simulator" to quit'],
            ["xcrun", "simctl", "shutdown", "all"],
            ["xcrun", "simctl", "erase", "all"],
        ],
        estimate_patterns=["~/Library/Developer/CoreSimulator/Devices/*/data"],
    ),
    # =============================================================================
    # THIRD-PARTY APPLICATIONS
    # =============================================================================
    CleanupTarget(
        id="gradle_cache",
        message="Cleaning up Gradle cache...",
        requires_path="~/.gradle/caches",
        patterns=["~/.gradle/caches"],
    ),
    CleanupTarget(
        id="dropbox_cache",
        message="Clearing Dropbox Cache Files...",
        requires_path="~/Dropbox",
        patterns=["~/Dropbox/.dropbox.cache/*"],
    ),
    CleanupTarget(
        id="google_drive_cache",
        message="Clearing Google Drive File Stream Cache Files...",
        mode=TargetMode.EXTERNAL_THEN_COLLECT,
        requires_path="~/Library/Application Support/Google/DriveFS",
        commands=[["killall", "Google Drive File Stream"]],
        patterns=["~/Library/Application Support/Google/DriveFS/[0-9a-zA-Z]*/content_cache"],
    ),
    CleanupTarget(
        id="composer_cache",
        message="Cleaning up composer...",
        mode=TargetMode.EXTERNAL,
        requires_command="composer",
        commands=[["composer", "clearcache", "--no-interaction"]],
        estimate_patterns=["~/Library/Caches/composer", "~/.composer/cache"],
    ),
    CleanupTarget(
        id="steam_cache",
        message="Clearing Steam Cache, Log, and Temp Files...",
        requires_path=_STEAM,
        patterns=[
            f"{_STEAM}/appcache",
            f"{_STEAM}/depotcache",
            f"{_STEAM}/logs",
            f"{_STEAM}/steamapps/shadercache",
            f"{_STEAM}/steamapps/temp",
            f"{_STEAM}/steamapps/download",
        ],
    ),
    CleanupTarget(
        id="minecraft_cache",
        message="Clearing Minecraft Cache and Log Files...",
        requires_path=_MINECRAFT,
        patterns=[
            f"{_MINECRAFT}/logs",
            f"{_MINECRAFT}/crash-reports",
            f"{_MINECRAFT}/webcache",
            f"{_MINECRAFT}/webcache2",
            f"{_MINECRAFT}/*.log",
            f"{_MINECRAFT}/launcher_cef_log.txt",
            f"{_MINECRAFT}/.mixin.out",
        ],
    ),
    CleanupTarget(
        id="lunar_client_cache",
        message="Deleting Lunar Client logs and caches...",
        requires_path="~/.lunarclient",
        patterns=[
            "~/.lunarclient/game-cache",
            "~/.lunarclient/launcher-cache",
            "~/.lunarclient/logs",
            "~/.lunarclient/offline/*/logs",
            "~/.lunarclient/offline/files/*/logs",
        ],
    ),
    CleanupTarget(
        id="wget_logs",
        message="Deleting Wget log and hosts file...",
        requires_path="~/wget-log",
        patterns=["~/wget-log", "~/.wget-hsts"],
    ),
    CleanupTarget(
        id="cacher_logs",
        message="Deleting Cacher logs...",
        requires_path="~/.cacher",
        patterns=["~/.cacher/logs"],
        privileged=True,
    ),
    CleanupTarget(
        id="android_cache",
        message="Deleting Android cache...",
        requires_path="~/.android",
        patterns=["~/.android/cache"],
    ),
    CleanupTarget(
        id="kite_logs",
        message="Deleting Kite logs...",
        requires_path="~/.kite",
        patterns=["~/.kite/logs"],
    ),
    # =============================================================================
    # PACKAGE MANAGERS & DEVELOPER TOOLS
    # =============================================================================
    CleanupTarget(
        id="homebrew",
        message="Cleaning up Homebrew Cache...",
        mode=TargetMode.EXTERNAL_THEN_COLLECT,
        requires_command="brew",
        update_commands=[["brew", "update"], ["brew", "upgrade"]],
        commands=[["brew", "cleanup", "-s"], ["brew", "tap", "--repair"]],
        patterns=["~/Library/Caches/Homebrew"],
    ),
    CleanupTarget(
        id="ruby_gems",
        message="Cleaning up any old versions of gems",
        mode=TargetMode.EXTERNAL,
        requires_command="gem",
        commands=[["gem", "cleanup"]],
    ),
    CleanupTarget(
        id="docker",
        message="Cleaning up Docker",
        mode=TargetMode.EXTERNAL,
        requires_command="docker",
        commands=[["docker", "system", "prune", "-af"]],
    ),
    CleanupTarget(
        id="pyenv_virtualenv_cache",
        message="Removing Pyenv-VirtualEnv Cache...",
        requires_env="PYENV_VIRTUALENV_CACHE_PATH",
        patterns=["$PYENV_VIRTUALENV_CACHE_PATH"],
    ),
    CleanupTarget(
        id="npm_cache",
        message="Cleaning up npm cache...",
        mode=TargetMode.EXTERNAL,
        requires_command="npm",
        commands=[["npm", "cache", "clean", "--force"]],
        estimate_patterns=["~/.npm/*"],
    ),
    CleanupTarget(
        id="yarn_cache",
        message="Cleaning up Yarn Cache...",
        mode=TargetMode.EXTERNAL,
        requires_command="yarn",
        commands=[["yarn", "cache", "clean", "--force"]],
        estimate_patterns=["~/Library/Caches/yarn"],
    ),
    CleanupTarget(
        id="pnpm_cache",
        message="Cleaning up pnpm Cache...",
        mode=TargetMode.EXTERNAL,
        requires_command="pnpm",
        commands=[["pnpm", "store", "prune"]],
        estimate_patterns=["~/.pnpm-store/*"],
    ),
    CleanupTarget(
        id="cocoapods_cache",
        message="Cleaning up Pod Cache...",
        mode=TargetMode.EXTERNAL,
        requires_command="pod",
        commands=[["pod", "cache", "clean", "--all"]],
        estimate_patterns=["~/Library/Caches/CocoaPods"],
    ),
    CleanupTarget(
        id="go_module_cache",
        message="Clearing Go module cache...",
        mode=TargetMode.EXTERNAL,
        requires_command="go",
        commands=[["go", "clean", "-modcache"]],
        # An unset GOPATH leaves the first pattern unexpanded, so it never matches
        estimate_patterns=["$GOPATH/pkg/mod", "~/go/pkg/mod"],
    ),
    CleanupTarget(
        id="teams_cache",
        message="Deleting Microsoft Teams logs and caches...",
        requires_path=_TEAMS,
        patterns=[
            f"{_TEAMS}/IndexedDB",
            f"{_TEAMS}/Cache",
            f"{_TEAMS}/Application Cache",
            f"{_TEAMS}/Code Cache",
            f"{_TEAMS}/blob_storage",
            f"{_TEAMS}/databases",
            f"{_TEAMS}/gpucache",
            f"{_TEAMS}/Local Storage",
            f"{_TEAMS}/tmp",
            f"{_TEAMS}/*logs*.txt",
            f"{_TEAMS}/watchdog",
            f"{_TEAMS}/*watchdog*.json",
        ],
    ),
    CleanupTarget(
        id="poetry_cache",
        message="Deleting Poetry cache...",
        requires_path="~/Library/Caches/pypoetry",
        patterns=["~/Library/Caches/pypoetry"],
    ),
    CleanupTarget(
        id="java_heap_dumps",
        message="Deleting Java heap dumps...",
        patterns=["~/*.hprof"],
    ),
    # =============================================================================
    # SYSTEM SERVICES (nothing to estimate)
    # =============================================================================
    CleanupTarget(
        id="dns_cache",
        message="Cleaning up DNS cache...",
        mode=TargetMode.EXTERNAL,
        requires_command="dscacheutil",
        sudo_commands=True,
        commands=[["dscacheutil", "-flushcache"], ["killall", "-HUP", "mDNSResponder"]],
    ),
    CleanupTarget(
        id="inactive_memory",
        message="Purging inactive memory...",
        mode=TargetMode.EXTERNAL,
        requires_command="purge",
        sudo_commands=True,
        commands=[["purge"]],
    ),
]


def get_target(target_id: str) -> Optional[CleanupTarget]:
    """Get a target by ID."""
    for target in TARGETS:
        if target.id == target_id:
            return target
    return None


def get_all_targets() -> list[CleanupTarget]:
    """Get all targets in run order."""
    return list(TARGETS)


def is_active(target: CleanupTarget, settings: Settings) -> bool:
    """
    Evaluate a target's activation predicate.

    Reads the filesystem and environment only; never has side effects.
    """
    if target.requires_env and not settings.has_env(target.requires_env):
        return False
    if target.requires_path and not expand_path(target.requires_path, settings.environ).exists():
        return False
    if target.requires_command and not has_command(target.requires_command):
        return False
    return True
