"""Tests for paced, cancellable delivery of traversal events."""

import asyncio

import pytest

import expression_visualizer.animation as animation

from expression_visualizer import (
  AnimationConfig, Expression, ResolvedEvent, StepAnimator, iter_events, stream_events
)

ROOT = Expression.from_infix("(3+5)*(2-8)").root
ALL_EVENTS = list(iter_events(ROOT))


def test_play_delivers_every_event_in_order():
  received = []
  animator = StepAnimator(received.append, AnimationConfig(step_delay=0))
  delivered = asyncio.run(animator.play(ROOT))
  assert delivered == received == ALL_EVENTS
  assert not animator.cancelled
  assert animator.current_node is ROOT


def test_async_callbacks_are_awaited():
  received = []

  async def on_event(event):
    await asyncio.sleep(0)
    received.append(event)

  asyncio.run(StepAnimator(on_event, AnimationConfig(step_delay=0)).play(ROOT))
  assert received == ALL_EVENTS


def test_callback_can_cancel_between_events():
  received = []

  def on_event(event):
    received.append(event)
    if isinstance(event, ResolvedEvent):
      animator.cancel()

  animator = StepAnimator(on_event, AnimationConfig(step_delay=0))
  delivered = asyncio.run(animator.play(ROOT))
  assert animator.cancelled
  assert delivered == received == ALL_EVENTS[:4]
  assert animator.current_node is ROOT.left.left


def test_cancel_from_another_task_keeps_delivered_prefix():
  received = []
  animator = StepAnimator(received.append, AnimationConfig(step_delay=0.05))

  async def scenario():
    task = asyncio.create_task(animator.play(ROOT))
    await asyncio.sleep(0.12)
    animator.cancel()
    return await task

  delivered = asyncio.run(scenario())
  assert animator.cancelled
  assert len(delivered) < len(ALL_EVENTS)
  assert delivered == ALL_EVENTS[:len(delivered)]


def test_cancel_after_last_event_is_normal_completion():
  received = []

  def on_event(event):
    received.append(event)
    if len(received) == len(ALL_EVENTS):
      animator.cancel()

  animator = StepAnimator(on_event, AnimationConfig(step_delay=0))
  assert asyncio.run(animator.play(ROOT)) == ALL_EVENTS


def test_empty_tree_plays_nothing():
  animator = StepAnimator(lambda event: None, AnimationConfig(step_delay=0))
  assert asyncio.run(animator.play(None)) == []
  assert animator.current_node is None


def test_stream_events_can_be_closed_early():
  async def first_three():
    stream = stream_events(ROOT, delay=0)
    events = []
    async for event in stream:
      events.append(event)
      if len(events) == 3:
        break
    await stream.aclose()
    return events

  assert asyncio.run(first_three()) == ALL_EVENTS[:3]


def test_negative_delay_is_rejected():
  with pytest.raises(ValueError):
    AnimationConfig(step_delay=-1)


def test_play_closes_the_stream_when_stopping_early(monkeypatch):
  original = animation.stream_events
  closed = []

  async def tracked_stream(root, delay=0.0):
    try:
      async for event in original(root, delay):
        yield event
    finally:
      closed.append(True)

  monkeypatch.setattr(animation, "stream_events", tracked_stream)

  def on_event(event):
    if isinstance(event, ResolvedEvent):
      animator.cancel()

  animator = StepAnimator(on_event, AnimationConfig(step_delay=0))

  async def scenario():
    delivered = await animator.play(ROOT)
    # checked before asyncio.run finalizes leftover async generators
    return delivered, list(closed)

  delivered, closed_during_run = asyncio.run(scenario())
  assert delivered == ALL_EVENTS[:4]
  assert closed_during_run == [True]
