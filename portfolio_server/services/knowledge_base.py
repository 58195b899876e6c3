"""Static names and descriptions for well-known sites, used when live extraction fails"""

from typing import Dict, Mapping, NamedTuple, Optional


class SiteInfo(NamedTuple):
    site_name: str
    description: str


KNOWN_SITES: Dict[str, SiteInfo] = {
    # Amazon region and Brazilian outlets
    "amazoniavox.com": SiteInfo("Amazônia Vox", "Jornalismo independente da Amazônia"),
    "infoamazonia.org": SiteInfo("InfoAmazônia", "Rede de jornalismo investigativo"),
    "agenciaamapa.com.br": SiteInfo("Agência Amapá", "Notícias do Amapá"),
    "jornalismoagcom.com": SiteInfo("Jornalismo AGCom", "Comunicação e jornalismo"),
    "g1.globo.com": SiteInfo("G1", "Portal de notícias da Globo"),
    "folha.uol.com.br": SiteInfo("Folha de S.Paulo", "Jornal Folha de S.Paulo"),
    "estadao.com.br": SiteInfo("O Estado de S. Paulo", "Estadão"),
    # International outlets
    "bbc.com": SiteInfo("BBC", "BBC News"),
    "bbc.co.uk": SiteInfo("BBC", "BBC News"),
    "cnn.com": SiteInfo("CNN", "CNN News"),
    "nytimes.com": SiteInfo("The New York Times", "The New York Times"),
    "washingtonpost.com": SiteInfo("The Washington Post", "The Washington Post"),
    "theguardian.com": SiteInfo("The Guardian", "The Guardian"),
    "reuters.com": SiteInfo("Reuters", "Reuters News"),
    "apnews.com": SiteInfo("Associated Press", "AP News"),
    "ap.news": SiteInfo("Associated Press", "AP News"),
    "theatlantic.com": SiteInfo("The Atlantic", "The Atlantic"),
    "newyorker.com": SiteInfo("The New Yorker", "The New Yorker"),
    "wired.com": SiteInfo("WIRED", "WIRED"),
    "vox.com": SiteInfo("Vox", "Vox"),
    # Platforms
    "medium.com": SiteInfo("Medium", "Read this article on Medium"),
    "substack.com": SiteInfo("Substack", "Read this newsletter on Substack"),
    "dev.to": SiteInfo("DEV Community", "Read this article on Dev.to"),
    "github.com": SiteInfo("GitHub", "GitHub Repository"),
    "linkedin.com": SiteInfo("LinkedIn", "Professional profile on LinkedIn"),
    "twitter.com": SiteInfo("X (Twitter)", "View this post on Twitter/X"),
    "x.com": SiteInfo("X (Twitter)", "View this post on Twitter/X"),
    "youtube.com": SiteInfo("YouTube", "Watch this video on YouTube"),
    "youtu.be": SiteInfo("YouTube", "Watch this video on YouTube"),
    "spotify.com": SiteInfo("Spotify", "Listen on Spotify"),
    "arxiv.org": SiteInfo("arXiv", "Academic paper on arXiv"),
    "researchgate.net": SiteInfo("ResearchGate", "Academic publication on ResearchGate"),
}


def _find_key(domain: str, table: Mapping[str, object] = KNOWN_SITES) -> str:
    domain = (domain or "").lower()
    if domain in table:
        return domain
    # Subdomains of a known site, e.g. edition.cnn.com
    for known in table:
        if domain.endswith("." + known):
            return known
    return ""


def is_known_site(domain: str) -> bool:
    return bool(_find_key(domain))


def lookup_site(domain: str) -> SiteInfo:
    """Curated name and description for a domain, or a generic pair built from it"""
    key = _find_key(domain)
    if key:
        return KNOWN_SITES[key]
    return SiteInfo(domain, f"Content from {domain}")


class FallbackHint(NamedTuple):
    title: str
    description: str


# What a link on these platforms usually is, for when the page cannot be read
FALLBACK_HINTS: Dict[str, FallbackHint] = {
    "linkedin.com": FallbackHint("LinkedIn Profile", "Professional profile on LinkedIn"),
    "twitter.com": FallbackHint("Twitter/X Post", "View this post on Twitter/X"),
    "x.com": FallbackHint("Twitter/X Post", "View this post on Twitter/X"),
    "youtube.com": FallbackHint("YouTube Video", "Watch this video on YouTube"),
    "youtu.be": FallbackHint("YouTube Video", "Watch this video on YouTube"),
    "medium.com": FallbackHint("Medium Article", "Read this article on Medium"),
    "dev.to": FallbackHint("Dev.to Article", "Read this article on Dev.to"),
    "arxiv.org": FallbackHint("arXiv Paper", "Academic paper on arXiv"),
    "researchgate.net": FallbackHint("ResearchGate Publication", "Academic publication on ResearchGate"),
}

GITHUB_DOMAIN = "github.com"
GITHUB_OPENGRAPH_IMAGE = "https://opengraph.githubassets.com/1/{owner}/{repo}"


class RepositoryPreview(NamedTuple):
    title: str
    description: str
    image: str


def lookup_fallback_hint(domain: str) -> Optional[FallbackHint]:
    key = _find_key(domain, FALLBACK_HINTS)
    return FALLBACK_HINTS[key] if key else None


def github_repository_preview(domain: str, path: str) -> Optional[RepositoryPreview]:
    """owner/repo title and GitHub's generated card image for repository links"""
    if (domain or "").lower() != GITHUB_DOMAIN:
        return None
    parts = [part for part in (path or "").split("/") if part]
    if len(parts) < 2:
        return None
    owner, repo = parts[0], parts[1]
    return RepositoryPreview(
        title=f"{owner}/{repo}",
        description="GitHub Repository",
        image=GITHUB_OPENGRAPH_IMAGE.format(owner=owner, repo=repo),
    )
