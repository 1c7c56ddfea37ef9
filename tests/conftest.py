import os
import pytest
from datetime import datetime, timezone
from pathlib import PurePosixPath
from urllib.parse import urlsplit

import ogpt.config
from ogpt.media import Audio, Image, Video
from ogpt.objects import Article, OpenGraphProtocol


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from real config files, OGPT_* variables and the cached config."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("OGPT_"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(ogpt.config, "_config", None)
    yield tmp_path


@pytest.fixture
def image():
    """Image from the documentation example."""
    image = Image()
    image.set_url("http://example.com/image.jpg")
    image.set_secure_url("https://example.com/image.jpg")
    image.set_type("image/jpeg")
    image.set_width(400)
    image.set_height(300)
    return image


@pytest.fixture
def video():
    """Flash video from the documentation example; type derived from the file extension."""
    video = Video()
    video.set_url("http://example.com/video.swf")
    video.set_secure_url("https://example.com/video.swf")
    extension = PurePosixPath(urlsplit(video.url).path).suffix
    video.set_type(Video.extension_to_media_type(extension))
    video.set_width(500)
    video.set_height(400)
    return video


@pytest.fixture
def audio():
    """Audio from the documentation example."""
    audio = Audio()
    audio.set_url("http://example.com/audio.mp3")
    audio.set_secure_url("https://example.com/audio.mp3")
    audio.set_type("audio/mpeg")
    return audio


@pytest.fixture
def ogp(image, audio, video):
    """Website description from the documentation example."""
    ogp = OpenGraphProtocol()
    ogp.set_locale("en_US")
    ogp.set_site_name("Happy place")
    ogp.set_title("Hello world")
    ogp.set_description("We make the world happy.")
    ogp.set_type("website")
    ogp.set_url("http://example.com/")
    ogp.set_determiner("the")
    ogp.add_image(image)
    ogp.add_audio(audio)
    ogp.add_video(video)
    return ogp


@pytest.fixture
def article():
    """Article from the documentation example."""
    article = Article()
    article.set_published_time("2011-11-03T01:23:45Z")
    article.set_modified_time(datetime(2013, 2, 15, 0, 39, 6, tzinfo=timezone.utc))
    article.set_expiration_time("2011-12-31T23:59:59+00:00")
    article.set_section("Front page")
    article.add_tag("weather")
    article.add_tag("football")
    article.add_author("http://example.com/author.html")
    return article


@pytest.fixture
def ogp_html():
    """Expected meta elements for the ``ogp`` fixture."""
    return "\n".join([
        '<meta property="og:type" content="website">',
        '<meta property="og:title" content="Hello world">',
        '<meta property="og:site_name" content="Happy place">',
        '<meta property="og:description" content="We make the world happy.">',
        '<meta property="og:url" content="http://example.com/">',
        '<meta property="og:determiner" content="the">',
        '<meta property="og:locale" content="en_US">',
        '<meta property="og:image" content="http://example.com/image.jpg">',
        '<meta property="og:image:height" content="300">',
        '<meta property="og:image:width" content="400">',
        '<meta property="og:image:secure_url" content="https://example.com/image.jpg">',
        '<meta property="og:image:type" content="image/jpeg">',
        '<meta property="og:audio" content="http://example.com/audio.mp3">',
        '<meta property="og:audio:secure_url" content="https://example.com/audio.mp3">',
        '<meta property="og:audio:type" content="audio/mpeg">',
        '<meta property="og:video" content="http://example.com/video.swf">',
        '<meta property="og:video:height" content="400">',
        '<meta property="og:video:width" content="500">',
        '<meta property="og:video:secure_url" content="https://example.com/video.swf">',
        '<meta property="og:video:type" content="application/x-shockwave-flash">',
    ])
